"""Domain records of a multi-domain deployment."""
