from server_startup.pipeline import main

main()
