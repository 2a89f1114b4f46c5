from keypad_calculator.app import main

main()
