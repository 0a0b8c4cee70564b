from rich import print
from rich.text import Text

from tuidiagrams import extract_diagram_blocks

DOCUMENT = """
# Checkout

```mermaid
graph LR
cart[Cart] --> pay{Paid?}
pay -->|yes| ship(Ship)
pay -->|no| cart
```

```mermaid
sequenceDiagram
participant C as Client
participant S as Shop
C->>S: checkout
S-->>C: receipt
```
"""


def main() -> None:
    for block in extract_diagram_blocks(DOCUMENT):
        print(f"[bold]{block.kind.value}[/bold]")
        if block.diagram is not None:
            print(Text(block.diagram.render()))


if __name__ == "__main__":
    main()
