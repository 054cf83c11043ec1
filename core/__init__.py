"""
Gesture-to-voxel state machine and its capture adapters.

Submodules are imported directly (core.voxel_store, core.session, ...);
camera and hand_tracker pull in OpenCV / MediaPipe.
"""
