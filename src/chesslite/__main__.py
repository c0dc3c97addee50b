from chesslite.app import main

main()
