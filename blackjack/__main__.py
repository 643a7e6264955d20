from blackjack.console import main

raise SystemExit(main())
