from mastermindtv.main import main

main()
