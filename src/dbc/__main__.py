from dbc.cli.run_example import main

main()
