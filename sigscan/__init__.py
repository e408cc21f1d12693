"""sigscan - find and remove files matching known-malicious SHA-1 signatures."""
