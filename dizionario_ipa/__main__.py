"""``python -m dizionario_ipa`` entry point.

Runs the CLI, or the HTTP API when ``--serve`` is on the command line
(``python -m dizionario_ipa --serve``).
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from dizionario_ipa.server.app import main as serve_main
        serve_main()
    else:
        from dizionario_ipa.cli import main
        main()
