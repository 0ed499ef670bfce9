"""Console utility for fetching Avro schemas from a Kafka schema registry."""
