from convert_it.cli import main

main()
