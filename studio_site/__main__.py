from studio_site.main import main

main()
