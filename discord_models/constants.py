"""Constants shared across the domain model."""

# Snowflake layout (MSB -> LSB): 42 timestamp bits, 5 worker, 5 process, 12 increment
DISCORD_EPOCH_MS = 1_420_070_400_000
SNOWFLAKE_TIMESTAMP_SHIFT = 22
SNOWFLAKE_WORKER_SHIFT = 17
SNOWFLAKE_PROCESS_SHIFT = 12
SNOWFLAKE_WORKER_MASK = 0x1F
SNOWFLAKE_PROCESS_MASK = 0x1F
SNOWFLAKE_INCREMENT_MASK = 0xFFF
SNOWFLAKE_MAX = (1 << 64) - 1

# Flag masks travel as signed 64-bit integers
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# Seconds a user stays in a channel's typing set after the last TYPING_START
TYPING_TTL = 15.0

# Interaction responses
MAX_RESPONSE_EMBEDS = 10

# Environment variable prefix for Config.load()
ENV_PREFIX = "DISCORD_MODELS_"
