from just_tcl.cli import main

main()
