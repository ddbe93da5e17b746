"""Group coordination constants."""

GROUP_ID_PREFIX = "group"
GROUP_ID_LENGTH = 8

# Stream consumer keys owned by the coordinator
GROUP_ID_STREAM_KEY = "group-ids"
GROUP_FORMATION_STREAM_PREFIX = "group-formation"
