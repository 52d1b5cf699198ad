from inv.cli import main

main()
