"""HTTP access to the pitch trajectory solver."""
