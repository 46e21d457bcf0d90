"""Turn ILLEGAL tokens into errors with strict mode."""

from monkeylex import IllegalCharacterError, LexConfig, lex_config_context, tokenize

source = "let price = 10 $;"

# Lenient (default): the illegal character is just another token
print([str(t) for t in tokenize(source)])

# Strict: the first illegal character raises with its location
with lex_config_context(LexConfig(strict=True)):
    try:
        tokenize(source, source_file="price.mk")
    except IllegalCharacterError as e:
        print(f"error: {e}")
