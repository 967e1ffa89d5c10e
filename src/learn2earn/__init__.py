"""Learn2Earn Hub backend."""
