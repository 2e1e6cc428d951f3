# Main.py
""""" Entry point for the derivative calculator.

   Responsibilities:
   - Verify required files exist when running from source
   - Load configuration
   - Start the Qt GUI, or the line-oriented command interpreter with --cli

"""""
import sys
from pathlib import Path

from symcalc import config_manager as config_manager
from symcalc.Calculator import Calculator


PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
    """

    package_dir = PROJECT_ROOT / "symcalc"

    REQUIRED = [
        package_dir / "UI.py",
        package_dir / "MathEngine.py",
        package_dir / "Calculator.py",
        package_dir / "config_manager.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error 1000: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def run_cli():
    """Read commands from stdin until EOF (EXPR / SAVE / DER / EVAL / PRINT)."""
    Calculator().run(sys.stdin)


def main(argv=None):

    """
    Load configuration and start the requested front end.
    - Keep this thin: no business logic here.
    """

    if argv is None:
        argv = sys.argv[1:]

    all_settings = config_manager.load_setting_value("all")
    if all_settings["debug"] == True:
        print("Config loaded:", all_settings)

    if "--cli" in argv or not sys.stdin.isatty():
        run_cli()
    else:
        # Imported here so the CLI works without a display
        from symcalc import UI as UI
        UI.main()


if __name__ == "__main__":
    check_files_exist()
    main()
