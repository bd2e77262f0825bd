from truct.cli import main

main()
