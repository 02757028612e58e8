from alltz.cli.app import main

main()
