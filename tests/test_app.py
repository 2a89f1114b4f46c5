import logging

import pytest

pytest.importorskip('PyQt5.QtWidgets')

from keypad_calculator.app import LOGGER_NAME, parse_args, setup_logger  # noqa: E402


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = (list(logger.handlers), logger.level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    for h in saved[0]:
        logger.addHandler(h)
    logger.setLevel(saved[1])


class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.log == 'keypad_calculator.log'
        assert args.button_size == 75
        assert args.verbose is False

    def test_options(self):
        args = parse_args(['--log', '', '--button-size', '60', '--verbose'])
        assert args.log == ''
        assert args.button_size == 60
        assert args.verbose is True

    def test_rejects_non_positive_button_size(self):
        with pytest.raises(SystemExit):
            parse_args(['--button-size', '0'])


class TestSetupLogger:

    def test_console_and_file(self, clean_logger, tmp_path):
        log_path = tmp_path / 'calc.log'
        logger = setup_logger(str(log_path))
        assert logger is clean_logger
        assert logger.level == logging.INFO
        kinds = {type(h) for h in logger.handlers}
        assert kinds == {logging.StreamHandler, logging.FileHandler}

        logging.getLogger('keypad_calculator.machine').warning('hello')
        for h in logger.handlers:
            h.flush()
        assert 'WARNING hello' in log_path.read_text(encoding='utf-8')

    def test_without_file(self, clean_logger):
        logger = setup_logger('', verbose=True)
        assert logger.level == logging.DEBUG
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]

    def test_idempotent(self, clean_logger):
        setup_logger('')
        setup_logger('')
        assert len(clean_logger.handlers) == 1
