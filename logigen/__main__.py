from logigen.cli import main

main()
