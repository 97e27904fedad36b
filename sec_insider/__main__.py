from sec_insider.cli import main

main()
