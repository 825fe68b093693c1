from dsexercises.cli import main

main()
