from bytelex.cli import main

raise SystemExit(main())
