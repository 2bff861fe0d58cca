"""Runtime services (telemetry) shared by the text core."""
