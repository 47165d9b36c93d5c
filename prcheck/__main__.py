from prcheck.main import main

raise SystemExit(main())
