from sshexec.cli import main

raise SystemExit(main())
