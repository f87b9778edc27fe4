from dich.main import main

main()
