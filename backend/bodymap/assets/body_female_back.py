"""Female back catalogue."""

from __future__ import annotations

from bodymap.assets._catalogue import load_catalogue

body_female_back = load_catalogue(
    [
        {
            "slug": "hair",
            "path": {
                "common": [
                    "M330 16 L394 16 L407 60 L362 52 L317 60 Z",
                ],
            },
        },
        {
            "slug": "head",
            "path": {
                "common": [
                    "M319 66 L362 58 L405 66 L396 120 L362 140 L328 120 Z",
                ],
            },
        },
        {
            "slug": "neck",
            "path": {
                "common": [
                    "M342 140 L382 140 L389 176 L335 176 Z",
                ],
            },
        },
        {
            "slug": "trapezius",
            "path": {
                "left": [
                    "M297 182 L360 150 L360 330 L324 260 L288 200 Z",
                ],
                "right": [
                    "M427 182 L364 150 L364 330 L400 260 L436 200 Z",
                ],
            },
        },
        {
            "slug": "deltoids",
            "path": {
                "left": [
                    "M249 196 L292 196 L286 258 L243 266 L236 230 Z",
                ],
                "right": [
                    "M475 196 L432 196 L438 258 L481 266 L488 230 Z",
                ],
            },
        },
        {
            "slug": "upper-back",
            "path": {
                "left": [
                    "M288 210 L322 266 L357 340 L306 380 L279 320 L277 250 Z",
                ],
                "right": [
                    "M436 210 L402 266 L367 340 L418 380 L445 320 L447 250 Z",
                ],
            },
        },
        {
            "slug": "triceps",
            "path": {
                "left": [
                    "M236 272 L276 266 L270 360 L234 368 L227 320 Z",
                ],
                "right": [
                    "M488 272 L448 266 L454 360 L490 368 L497 320 Z",
                ],
            },
        },
        {
            "slug": "lower-back",
            "path": {
                "left": [
                    "M315 388 L358 350 L358 470 L321 470 Z",
                ],
                "right": [
                    "M409 388 L366 350 L366 470 L403 470 Z",
                ],
            },
        },
        {
            "slug": "forearm",
            "path": {
                "left": [
                    "M225 376 L268 368 L252 480 L216 500 L204 450 Z",
                ],
                "right": [
                    "M499 376 L456 368 L472 480 L508 500 L520 450 Z",
                ],
            },
        },
        {
            "slug": "hands",
            "path": {
                "left": [
                    "M195 520 L220 506 L225 580 L198 600 L180 570 Z",
                ],
                "right": [
                    "M529 520 L504 506 L499 580 L526 600 L544 570 Z",
                ],
            },
        },
        {
            "slug": "gluteal",
            "path": {
                "left": [
                    "M288 480 L358 480 L358 590 L306 600 L279 560 Z",
                ],
                "right": [
                    "M436 480 L366 480 L366 590 L418 600 L445 560 Z",
                ],
            },
        },
        {
            "slug": "adductors",
            "path": {
                "left": [
                    "M331 600 L358 598 L351 680 L335 660 Z",
                ],
                "right": [
                    "M393 600 L366 598 L373 680 L389 660 Z",
                ],
            },
        },
        {
            "slug": "hamstring",
            "path": {
                "left": [
                    "M281 606 L330 604 L333 760 L290 760 L274 680 Z",
                ],
                "right": [
                    "M443 606 L394 604 L391 760 L434 760 L450 680 Z",
                ],
            },
        },
        {
            "slug": "knees",
            "path": {
                "left": [
                    "M288 770 L333 772 L331 820 L292 820 Z",
                ],
                "right": [
                    "M436 770 L391 772 L393 820 L432 820 Z",
                ],
            },
        },
        {
            "slug": "calves",
            "path": {
                "left": [
                    "M281 830 L333 830 L330 960 L303 990 L277 930 Z",
                ],
                "right": [
                    "M443 830 L391 830 L394 960 L421 990 L447 930 Z",
                ],
            },
        },
        {
            "slug": "ankles",
            "path": {
                "left": [
                    "M303 1000 L324 1000 L322 1030 L303 1030 Z",
                ],
                "right": [
                    "M421 1000 L400 1000 L402 1030 L421 1030 Z",
                ],
            },
        },
        {
            "slug": "feet",
            "path": {
                "left": [
                    "M297 1034 L326 1034 L330 1080 L279 1086 L281 1060 Z",
                ],
                "right": [
                    "M427 1034 L398 1034 L394 1080 L445 1086 L443 1060 Z",
                ],
            },
        },
    ]
)
