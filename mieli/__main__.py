from mieli.cli import main

main()
