# src/todomvc/__main__.py

from .cli.main import main

main()
