from paygate.demo import main

raise SystemExit(main())
