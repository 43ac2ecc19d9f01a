from magic_squares.cli import main

raise SystemExit(main())
