"""Scan an expression and print each token — zero config, zero deps."""

from bytelex import Scanner

scanner = Scanner(b"1 + 2 * 3 asdsda\n ds")
for token in scanner.tokenize():
    print(token)
