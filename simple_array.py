#!/usr/bin/env python
"""
Simple example using strided
Builds a small 3-D array and walks through access, extraction and reshaping.
"""

import strided as st


def main():
    """Exercise the public StridedArray API on a (2, 2, 2) cube"""
    print("strided Simple Example - 2x2x2 cube")

    cube = st.from_data([1., 2., 3., 4., 5., 6., 7., 8.], (2, 2, 2))
    print(f"\nshape={cube.shape} strides={cube.strides} capacity={cube.capacity}")

    # Scalar access
    print(f"cube[1, 0, 1] = {cube[1, 0, 1]}")
    cube[1, 0, 1] = 60.0
    print(f"after set: cube[1, 0, 1] = {cube.get((1, 0, 1))}")

    # Sub-array extraction copies
    print(f"\ncube.subarray([1]) = {cube.subarray([1])}")
    print(f"cube.subarray([0, 1]) = {cube.subarray([0, 1])}")

    # Flat range slice
    print(f"cube.slice((0, 0, 0), (1, 0, 0)) = {cube.slice((0, 0, 0), (1, 0, 0)).tolist()}")

    # Reshape in place, view as a copy
    cube.reshape((4, 2))
    print(f"\nreshaped: {cube}")
    print(f"view as (8,): {cube.view((8,))}")

    try:
        cube.reshape((3, 3))
    except st.CapacityMismatch as e:
        print(f"\nreshape rejected: {e}")

    try:
        cube.get((4, 0))
    except st.IndexOutOfBounds as e:
        print(f"get rejected: {e}")

    return 0

if __name__ == "__main__":
    main()
