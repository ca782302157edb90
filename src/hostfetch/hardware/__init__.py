"""Hardware and operating system detection."""
