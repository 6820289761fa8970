from typed_ansi import Ansi4BitColour, AnsiText, enable_ansi
from typed_ansi.text import bold, fg


enable_ansi()

title = AnsiText("typed_ansi").fg(Ansi4BitColour.BrightCyan).bold()
print(title)
print(AnsiText("warning").bg(Ansi4BitColour.Yellow).fg(Ansi4BitColour.Black))
print(AnsiText("8-bit").fg(208).underline())
print(AnsiText("24-bit").fg("#ff5f87").italic())
print(bold(fg("helpers", (120, 200, 80))))
print(AnsiText("plain text is left untouched"))
