"""Male back catalogue."""

from __future__ import annotations

from bodymap.assets._catalogue import load_catalogue

body_back = load_catalogue(
    [
        {
            "slug": "hair",
            "path": {
                "common": [
                    "M326 16 L398 16 L412 60 L362 52 L312 60 Z",
                ],
            },
        },
        {
            "slug": "head",
            "path": {
                "common": [
                    "M314 66 L362 58 L410 66 L400 120 L362 140 L324 120 Z",
                ],
            },
        },
        {
            "slug": "neck",
            "path": {
                "common": [
                    "M340 140 L384 140 L392 176 L332 176 Z",
                ],
            },
        },
        {
            "slug": "trapezius",
            "path": {
                "left": [
                    "M290 182 L360 150 L360 330 L320 260 L280 200 Z",
                ],
                "right": [
                    "M434 182 L364 150 L364 330 L404 260 L444 200 Z",
                ],
            },
        },
        {
            "slug": "deltoids",
            "path": {
                "left": [
                    "M236 196 L284 196 L278 258 L230 266 L222 230 Z",
                ],
                "right": [
                    "M488 196 L440 196 L446 258 L494 266 L502 230 Z",
                ],
            },
        },
        {
            "slug": "upper-back",
            "path": {
                "left": [
                    "M280 210 L318 266 L356 340 L300 380 L270 320 L268 250 Z",
                ],
                "right": [
                    "M444 210 L406 266 L368 340 L424 380 L454 320 L456 250 Z",
                ],
            },
        },
        {
            "slug": "triceps",
            "path": {
                "left": [
                    "M222 272 L266 266 L260 360 L220 368 L212 320 Z",
                ],
                "right": [
                    "M502 272 L458 266 L464 360 L504 368 L512 320 Z",
                ],
            },
        },
        {
            "slug": "lower-back",
            "path": {
                "left": [
                    "M310 388 L358 350 L358 470 L316 470 Z",
                ],
                "right": [
                    "M414 388 L366 350 L366 470 L408 470 Z",
                ],
            },
        },
        {
            "slug": "forearm",
            "path": {
                "left": [
                    "M210 376 L258 368 L240 480 L200 500 L186 450 Z",
                ],
                "right": [
                    "M514 376 L466 368 L484 480 L524 500 L538 450 Z",
                ],
            },
        },
        {
            "slug": "hands",
            "path": {
                "left": [
                    "M176 520 L204 506 L210 580 L180 600 L160 570 Z",
                ],
                "right": [
                    "M548 520 L520 506 L514 580 L544 600 L564 570 Z",
                ],
            },
        },
        {
            "slug": "gluteal",
            "path": {
                "left": [
                    "M280 480 L358 480 L358 590 L300 600 L270 560 Z",
                ],
                "right": [
                    "M444 480 L366 480 L366 590 L424 600 L454 560 Z",
                ],
            },
        },
        {
            "slug": "adductors",
            "path": {
                "left": [
                    "M328 600 L358 598 L350 680 L332 660 Z",
                ],
                "right": [
                    "M396 600 L366 598 L374 680 L392 660 Z",
                ],
            },
        },
        {
            "slug": "hamstring",
            "path": {
                "left": [
                    "M272 606 L326 604 L330 760 L282 760 L264 680 Z",
                ],
                "right": [
                    "M452 606 L398 604 L394 760 L442 760 L460 680 Z",
                ],
            },
        },
        {
            "slug": "knees",
            "path": {
                "left": [
                    "M280 770 L330 772 L328 820 L284 820 Z",
                ],
                "right": [
                    "M444 770 L394 772 L396 820 L440 820 Z",
                ],
            },
        },
        {
            "slug": "calves",
            "path": {
                "left": [
                    "M272 830 L330 830 L326 960 L296 990 L268 930 Z",
                ],
                "right": [
                    "M452 830 L394 830 L398 960 L428 990 L456 930 Z",
                ],
            },
        },
        {
            "slug": "ankles",
            "path": {
                "left": [
                    "M296 1000 L320 1000 L318 1030 L296 1030 Z",
                ],
                "right": [
                    "M428 1000 L404 1000 L406 1030 L428 1030 Z",
                ],
            },
        },
        {
            "slug": "feet",
            "path": {
                "left": [
                    "M290 1034 L322 1034 L326 1080 L270 1086 L272 1060 Z",
                ],
                "right": [
                    "M434 1034 L402 1034 L398 1080 L454 1086 L452 1060 Z",
                ],
            },
        },
    ]
)
