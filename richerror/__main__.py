# richerror/__main__.py
from richerror.cli.main import main

raise SystemExit(main())
