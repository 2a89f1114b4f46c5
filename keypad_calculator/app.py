#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# app.py
# Python 3.x, PyQt5

import sys
import argparse
import logging

from PyQt5.QtWidgets import QApplication

from keypad_calculator.window import BUTTON_SIZE, CalculatorWindow

LOGGER_NAME = 'keypad_calculator'
DEFAULT_LOG = 'keypad_calculator.log'


def setup_logger(log_path=DEFAULT_LOG, verbose=False):
    """콘솔과 파일(UTF-8)로 동시에 로그를 남기는 로거를 설정한다."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔
    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8), 경로가 비어 있으면 생략
    if log_path:
        fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='사칙연산 키패드 계산기(PyQt5)를 실행합니다.'
    )
    parser.add_argument('--log', default=DEFAULT_LOG,
                        help='로그 파일 경로(기본값: keypad_calculator.log, 빈 문자열이면 파일 로그 생략)')
    parser.add_argument('--button-size', type=int, default=BUTTON_SIZE,
                        help='버튼 한 변의 픽셀 크기(기본값: 75)')
    parser.add_argument('--verbose', action='store_true',
                        help='버튼 입력마다 상태를 DEBUG 로그로 남깁니다')
    args = parser.parse_args(argv)
    if args.button_size <= 0:
        parser.error('--button-size 는 양수여야 합니다')
    return args


def main(argv=None) -> None:
    args = parse_args(argv)
    logger = setup_logger(args.log, verbose=args.verbose)

    app = QApplication(sys.argv[:1])
    w = CalculatorWindow(button_size=args.button_size)
    w.show()
    logger.info('[시작] 계산기 창을 열었습니다 (버튼 크기=%d)', args.button_size)
    code = app.exec_()
    logger.info('[종료] 종료 코드=%d', code)
    sys.exit(code)


if __name__ == '__main__':
    main()
