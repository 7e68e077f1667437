"""Chat text components, styles, colours and click and hover events."""