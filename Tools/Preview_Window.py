"""
Preview_Window.py

Live preview of the frame being sampled next to the art built so far.
Purely for watching a run; closing it (q) never changes the output.
"""

import cv2
import numpy as np

FRAME_WINDOW = "Movie Preview"
ART_WINDOW = "Wall Art Preview"


def fit_to_screen(image, max_side):
    h, w = image.shape[:2]
    scale = max_side / max(h, w)
    if scale >= 1.0:
        return image
    return cv2.resize(image, (max(1, int(w * scale)), max(1, int(h * scale))),
                      interpolation=cv2.INTER_AREA)


class PreviewWindow:
    def __init__(self, fps=300, max_side=720):
        self.delay_ms = max(1, int(1000 / fps))
        self.max_side = max_side
        self.active = True

    def show(self, frame, art_image, column_id):
        if not self.active:
            return
        art_view = art_image.copy()
        # mark the column being written
        art_view[:, column_id, :] = np.array([0, 0, 255], dtype=np.uint8)
        try:
            cv2.imshow(FRAME_WINDOW, fit_to_screen(frame, self.max_side))
            cv2.imshow(ART_WINDOW, fit_to_screen(art_view, self.max_side))
            key = cv2.waitKey(self.delay_ms) & 0xFF
        except cv2.error as e:
            print(f"[WARN] Preview disabled, no display available: {str(e).strip()}")
            self.active = False
            return
        if key == ord('q'):
            print("[INFO] Preview closed, art generation continues.")
            self.close()

    def close(self):
        if not self.active:
            return
        self.active = False
        try:
            cv2.destroyAllWindows()
        except cv2.error:
            pass
