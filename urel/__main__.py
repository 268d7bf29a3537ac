from urel.cli.app import main

main()
