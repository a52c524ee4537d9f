from ansi2mirc.cli.main import main

main()
