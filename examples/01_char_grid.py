from typed_ansi import AnsiChar, AnsiTextFlags, enable_ansi


enable_ansi()

for row in range(6):
    line = []
    for col in range(36):
        c = AnsiChar(" ", bg=16 + row * 36 + col)
        if (row + col) % 7 == 0:
            c.value = "*"
            c.flags = AnsiTextFlags.BOLD
        line.append(str(c))
    print("".join(line))
