from dotenv_exec.cli import main

raise SystemExit(main())
