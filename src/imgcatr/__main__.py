from imgcatr.cli import main

main()
