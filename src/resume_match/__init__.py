"""Resume-to-job-posting matching engine."""
