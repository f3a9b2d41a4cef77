VERSION = "0.28.2"
