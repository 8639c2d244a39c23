from pymatinv.benchmark.solvers import main

raise SystemExit(main())
