"""Key-value store backends implementing core.ports.KeyValueStore."""
