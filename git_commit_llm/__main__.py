import sys

from git_commit_llm.cli.main import main

sys.exit(main())
