"""Male front catalogue."""

from __future__ import annotations

from bodymap.assets._catalogue import load_catalogue

body_front = load_catalogue(
    [
        {
            "slug": "head",
            "path": {
                "common": [
                    "M330 20 L394 20 L410 70 L400 120 L362 140 L324 120 L314 70 Z",
                ],
            },
        },
        {
            "slug": "neck",
            "path": {
                "common": [
                    "M340 140 L384 140 L392 180 L332 180 Z",
                ],
            },
        },
        {
            "slug": "trapezius",
            "path": {
                "left": [
                    "M424 180 L392 180 L404 200 L444 196 Z",
                ],
                "right": [
                    "M300 180 L332 180 L320 200 L280 196 Z",
                ],
            },
        },
        {
            "slug": "deltoids",
            "path": {
                "left": [
                    "M484 196 L434 196 L444 260 L492 270 L498 230 Z",
                ],
                "right": [
                    "M240 196 L290 196 L280 260 L232 270 L226 230 Z",
                ],
            },
        },
        {
            "slug": "chest",
            "path": {
                "left": [
                    "M432 200 L364 204 L364 290 L424 300 L442 262 Z",
                ],
                "right": [
                    "M292 200 L360 204 L360 290 L300 300 L282 262 Z",
                ],
            },
        },
        {
            "slug": "biceps",
            "path": {
                "left": [
                    "M498 276 L454 268 L462 360 L502 370 L510 320 Z",
                ],
                "right": [
                    "M226 276 L270 268 L262 360 L222 370 L214 320 Z",
                ],
            },
        },
        {
            "slug": "triceps",
            "path": {
                "left": [
                    "M518 290 L502 280 L512 360 L526 350 Z",
                ],
                "right": [
                    "M206 290 L222 280 L212 360 L198 350 Z",
                ],
            },
        },
        {
            "slug": "forearm",
            "path": {
                "left": [
                    "M514 376 L466 368 L484 480 L524 500 L538 450 Z",
                    "M538 452 L524 500 L540 520 L548 480 Z",
                ],
                "right": [
                    "M210 376 L258 368 L240 480 L200 500 L186 450 Z",
                    "M186 452 L200 500 L184 520 L176 480 Z",
                ],
            },
        },
        {
            "slug": "hands",
            "path": {
                "left": [
                    "M548 520 L520 506 L514 580 L544 600 L564 570 Z",
                ],
                "right": [
                    "M176 520 L204 506 L210 580 L180 600 L160 570 Z",
                ],
            },
        },
        {
            "slug": "abs",
            "path": {
                "left": [
                    "M394 300 L364 300 L364 360 L394 362 Z",
                    "M394 366 L364 364 L364 430 L392 432 Z",
                    "M392 436 L364 434 L364 500 L388 500 Z",
                ],
                "right": [
                    "M330 300 L360 300 L360 360 L330 362 Z",
                    "M330 366 L360 364 L360 430 L332 432 Z",
                    "M332 436 L360 434 L360 500 L336 500 Z",
                ],
            },
        },
        {
            "slug": "obliques",
            "path": {
                "left": [
                    "M432 304 L398 302 L396 470 L424 450 L438 380 Z",
                ],
                "right": [
                    "M292 304 L326 302 L328 470 L300 450 L286 380 Z",
                ],
            },
        },
        {
            "slug": "adductors",
            "path": {
                "left": [
                    "M404 540 L368 520 L374 640 L394 620 Z",
                ],
                "right": [
                    "M320 540 L356 520 L350 640 L330 620 Z",
                ],
            },
        },
        {
            "slug": "quadriceps",
            "path": {
                "left": [
                    "M446 520 L406 546 L398 640 L418 760 L452 740 L462 620 Z",
                    "M406 660 L380 650 L388 760 L412 770 Z",
                ],
                "right": [
                    "M278 520 L318 546 L326 640 L306 760 L272 740 L262 620 Z",
                    "M318 660 L344 650 L336 760 L312 770 Z",
                ],
            },
        },
        {
            "slug": "knees",
            "path": {
                "left": [
                    "M444 770 L394 772 L396 820 L440 820 Z",
                ],
                "right": [
                    "M280 770 L330 772 L328 820 L284 820 Z",
                ],
            },
        },
        {
            "slug": "tibialis",
            "path": {
                "left": [
                    "M424 830 L402 830 L408 990 L422 990 Z",
                ],
                "right": [
                    "M300 830 L322 830 L316 990 L302 990 Z",
                ],
            },
        },
        {
            "slug": "calves",
            "path": {
                "left": [
                    "M448 830 L426 834 L428 960 L452 930 L458 880 Z",
                ],
                "right": [
                    "M276 830 L298 834 L296 960 L272 930 L266 880 Z",
                ],
            },
        },
        {
            "slug": "ankles",
            "path": {
                "left": [
                    "M428 1000 L404 1000 L406 1030 L428 1030 Z",
                ],
                "right": [
                    "M296 1000 L320 1000 L318 1030 L296 1030 Z",
                ],
            },
        },
        {
            "slug": "feet",
            "path": {
                "left": [
                    "M434 1034 L402 1034 L398 1080 L454 1086 L452 1060 Z",
                ],
                "right": [
                    "M290 1034 L322 1034 L326 1080 L270 1086 L272 1060 Z",
                ],
            },
        },
    ]
)
