# symbol -> weight; the default draw ignores the weights
SYMBOLS: dict[str, int] = {'A': 5, 'B': 4, 'C': 3, 'D': 2}
