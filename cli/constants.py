"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["select", "remove", "files", "convert", "save", "status", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#2563EB bold",
        "command": "#7C3AED bold",
    }
)

BLUE = "\033[38;2;37;99;235m"
RESET = "\033[0m"

LOGO = f"""{BLUE}
 ███████╗███╗   ██╗ █████╗ ██████╗ ███╗   ███╗███████╗██████╗  ██████╗ ███████╗
 ██╔════╝████╗  ██║██╔══██╗██╔══██╗████╗ ████║██╔════╝██╔══██╗██╔════╝ ██╔════╝
 ███████╗██╔██╗ ██║███████║██████╔╝██╔████╔██║█████╗  ██████╔╝██║  ███╗█████╗
 ╚════██║██║╚██╗██║██╔══██║██╔═══╝ ██║╚██╔╝██║██╔══╝  ██╔══██╗██║   ██║██╔══╝
 ███████║██║ ╚████║██║  ██║██║     ██║ ╚═╝ ██║███████╗██║  ██║╚██████╔╝███████╗
 ╚══════╝╚═╝  ╚═══╝╚═╝  ╚═╝╚═╝     ╚═╝     ╚═╝╚══════╝╚═╝  ╚═╝ ╚═════╝ ╚══════╝
{RESET}"""

WELCOME_TITLE = "SnapMerge CLI - Convert files into a single labeled PDF"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "snapmerge> "

HELP_TEXT = """Available commands:
  select <path...>        Select files to convert (replaces the current selection)
  remove <index>          Remove a selected file by its position (see 'files')
  files                   List selected files
  convert                 Send the selected files to the conversion service
  save [output_path]      Save the converted PDF (defaults to the current directory)
  status                  Show the conversion status
  clear                   Clear screen and redisplay welcome message
  help                    Show this help
  exit                    Exit REPL

All file types are accepted; the conversion service decides which files it can use.
Glob patterns are expanded: 'select scans/*.png'.
Examples:
  select passport.jpg visa-photo.png bank-statement.pdf
  remove 0
  convert
  save
  save downloads/application.pdf"""
