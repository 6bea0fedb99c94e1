# This file marks the services package for API rendering logic.
# It exists so routers can depend on cohesive service classes instead of calling renderers directly.
# Service modules isolate rendering and limits from transport concerns.
