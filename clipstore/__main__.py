from clipstore.cli import main

raise SystemExit(main())
