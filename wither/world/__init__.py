"""World coordinates, chunk views, block faces, item stacks and biomes."""