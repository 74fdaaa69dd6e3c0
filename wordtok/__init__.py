# Word-level tokenizer engine and its HTTP surface
