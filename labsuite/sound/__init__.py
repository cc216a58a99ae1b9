"""Second-by-second WAV processing with mute, mix and volume converters."""