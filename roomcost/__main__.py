from roomcost.cli import main

raise SystemExit(main())
