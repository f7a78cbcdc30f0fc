"""Console status lines.

Everything the generator reports goes through here so the output format
stays in one place.
"""

SUCCESS_MARK = "✔"
ERROR_MARK = "✖"


def info(text):
    print(f"  {text}")


def success(text):
    print(f"  {SUCCESS_MARK}  {text}")


def error(text):
    print(f"  {ERROR_MARK}  {text}")


def header(text):
    print()
    print(text)
    print("=" * len(text))
