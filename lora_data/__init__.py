"""Loading and normalization of LoRA fine-tuning data sets."""
