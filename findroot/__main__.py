from findroot.cli import main

main()
