from decomment.cli import main

main()
