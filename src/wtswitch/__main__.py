from wtswitch.cli.cli import main

main()
