from figtok.cli import main

main()
