# mcwss

A websocket server for Minecraft Bedrock Edition. The game can connect to a
websocket server from its chat. Once it is connected, the server can run commands
as that player, control the player's agent, change blocks in the world and
subscribe to game events such as blocks being placed, items being crafted or the
player travelling.

## Requirements

- Python 3.10 or later
- `websockets`

## Starting a server

```python
from mcwss.server import Server

server = Server()


@server.on_connection
def greet(player):
    player.send_message("Welcome to the websocket server!")
    player.on_block_placed(lambda event: print("block placed:", event.block))
    player.on_player_message(lambda event: print("chat:", event.message))


server.on_disconnection(lambda player: print("player left"))
server.run()
```

`Server(config)` takes a `mcwss.config.Config` with a `handler_pattern` (the
websocket path) and an `address` (`host:port`). Without one it uses
`mcwss.config.default_config()`: path `/ws` on port 8000 on all interfaces. In a
world with cheats enabled, open the chat and use the game's connect command with
the address `localhost:8000/ws`. Connections made on any other path are closed.

`server.run()` blocks until the server is stopped. Inside a running event loop,
await `server.serve()` instead.

The connection handler is called once, after the first packet from the client
has been handled. The server itself asks the client for the player's name as soon
as it connects, so `player.name` is normally filled by then.

## Talking to players

A connected `mcwss.player.Player` offers:

- `send_message(message, *args)` – a private raw text message to the player only
- `tell(message, *args)` – a private message through the tell command
- `say(message, *args)` – a broadcast sent as if the player said it
- `position(callback)` – asks for the player's position and passes a
  `mcwss.mctype.Position` to `callback`
- `edu_information(callback)` – passes a `mcwss.command.client.EduClientInfo`
- `close_chat()` – closes the chat window if it is open
- `close_connection()` – asks the client to close the websocket
- `exec(command_line, callback=None, response_type=None)` – runs any command
  (without the leading slash); the callback receives the response decoded into
  `response_type`, or the parsed JSON object when no type is given
- `exec_as(command_line, callback=None)` – runs a command as the player; the
  callback receives only the status code

Messages are formatted with `%` when arguments are given.

## Events

Subscribe with the `on_...` methods, for example `on_item_crafted`,
`on_mob_killed`, `on_travelled` or `on_screen_changed`. Each handler receives the
decoded event object from `mcwss.event` and each method returns the handler, so
they work as decorators. One handler is kept per event; subscribing again
replaces it. The shared properties of the latest event are on
`player.properties`.

`unsubscribe_from(event_name)` and `unsubscribe_from_all()` stop events from
being sent; names are members of `mcwss.event.registry.EventName`. Events keep
arriving from the client even after reconnecting, so the server unsubscribes from
everything when a player disconnects.

A connection is dropped when the client sends an error, a response to an unknown
request, malformed JSON or an event that has no handler.

## Agents and worlds

`player.agent` (`mcwss.agent.Agent`) moves, turns, attacks, places, destroys and
tills blocks with the player's agent and reports its position and rotation.
`player.world` (`mcwss.world.World`) broadcasts messages, sets blocks (data value
0 to 15, otherwise `ValueError`), destroys blocks and spawns particles.

Command lines and response types live in `mcwss.command`, for example
`mcwss.command.agent.agent_move_request`,
`mcwss.command.world.top_solid_block_request`, or
`mcwss.command.chunk_data.parse_chunk_data` for decoding education edition chunk
data into colours and heights. `mcwss.protocol` holds the packet types and
`decode_packet`.

## Debugging

`player.enable_debug()` logs, through the `logging` module, the fields of
incoming events that the decoded event objects do not account for or read
differently.

## What it does not do

The server does not encrypt connections: `enable_encryption_request` builds the
command, but no key exchange is carried out and all traffic stays plain JSON.
It serves only the websocket; there is no command-line program and nothing is
stored between sessions.