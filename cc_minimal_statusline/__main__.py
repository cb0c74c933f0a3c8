from cc_minimal_statusline.cli import main

main()
