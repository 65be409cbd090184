from meteocli.cli import main

raise SystemExit(main())
