"""Models for Pub/Sub, Memorystore (Redis) and Spanner resources."""