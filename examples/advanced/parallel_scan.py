"""Thread safe — scan 1000 programs in parallel, one Lexer per task."""

from concurrent.futures import ThreadPoolExecutor

from monkeylex import tokenize

programs = ["let x = " + str(i) + ";\nlet add = fn(a, b) { a + b; };" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize, programs))

print(f"Scanned {len(results)} programs in parallel")
print("First program tokens:", len(results[0]))
print("Last program tokens:", len(results[-1]))
