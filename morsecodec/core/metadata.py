APP_NAME = "MorseCodec"
APP_VERSION = "1.0.0"
