"""Events the client sends to subscribed websocket servers, and their registry."""