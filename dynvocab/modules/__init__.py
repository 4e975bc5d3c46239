"""dynvocab modules: vocab_parser → vocab_config → vocab_host."""
