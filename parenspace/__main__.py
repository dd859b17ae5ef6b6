from parenspace.cli import main

raise SystemExit(main())
