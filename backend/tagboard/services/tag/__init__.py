"""Tag game domain services: scoring, ranking, log loading and the live clock.

The scoring and ranking modules are pure logic over in-memory events; HTTP
routes, socket handlers and the CLI import from here, keeping transport
concerns separated from the game rules.
"""



