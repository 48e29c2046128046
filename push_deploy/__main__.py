"""Allow `python -m push_deploy`"""

from .cli.main import main

main()
