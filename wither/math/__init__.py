"""Vectors, block positions, bounding boxes and numeric helpers."""