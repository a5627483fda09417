"""Id-bound wrappers over ``FaceitClient``.

Each wrapper holds a client and one identifier and forwards to the matching
client method, so the id is not repeated on every call:

```python
player = client.player("f1a2b3")
history = await player.history("cs2", HistoryWindow(limit=20))
bans = await player.bans()
```
"""

from faceit_client.resources.championship import Championship
from faceit_client.resources.game import Game
from faceit_client.resources.hub import Hub
from faceit_client.resources.match import Match
from faceit_client.resources.player import Player

__all__ = ["Championship", "Game", "Hub", "Match", "Player"]
