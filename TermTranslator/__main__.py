from TermTranslator.main import main

main()
