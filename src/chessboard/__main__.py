from chessboard.app import main

main()
