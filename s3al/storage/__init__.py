"""In-memory hierarchical file system with JSON snapshots."""