from encore.main import main

main()
