from orgapi.cli import main

main()
