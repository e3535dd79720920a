from gridsharp.dice.main import main

if __name__ == "__main__":
    main()
