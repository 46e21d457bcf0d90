"""Scan a statement and print its tokens — zero config, zero deps."""

from monkeylex import tokenize

for token in tokenize("let five = 5;"):
    print(token)
