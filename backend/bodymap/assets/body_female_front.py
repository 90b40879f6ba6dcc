"""Female front catalogue."""

from __future__ import annotations

from bodymap.assets._catalogue import load_catalogue

body_female_front = load_catalogue(
    [
        {
            "slug": "hair",
            "path": {
                "common": [
                    "M326 14 L398 14 L412 64 L400 110 L362 40 L324 110 L312 64 Z",
                ],
            },
        },
        {
            "slug": "head",
            "path": {
                "common": [
                    "M333 20 L391 20 L405 70 L396 120 L362 140 L328 120 L319 70 Z",
                ],
            },
        },
        {
            "slug": "neck",
            "path": {
                "common": [
                    "M342 140 L382 140 L389 180 L335 180 Z",
                ],
            },
        },
        {
            "slug": "trapezius",
            "path": {
                "left": [
                    "M418 180 L389 180 L400 200 L436 196 Z",
                ],
                "right": [
                    "M306 180 L335 180 L324 200 L288 196 Z",
                ],
            },
        },
        {
            "slug": "deltoids",
            "path": {
                "left": [
                    "M472 196 L427 196 L436 260 L479 270 L484 230 Z",
                ],
                "right": [
                    "M252 196 L297 196 L288 260 L245 270 L240 230 Z",
                ],
            },
        },
        {
            "slug": "chest",
            "path": {
                "left": [
                    "M425 200 L364 204 L364 290 L418 300 L434 262 Z",
                ],
                "right": [
                    "M299 200 L360 204 L360 290 L306 300 L290 262 Z",
                ],
            },
        },
        {
            "slug": "biceps",
            "path": {
                "left": [
                    "M484 276 L445 268 L452 360 L488 370 L495 320 Z",
                ],
                "right": [
                    "M240 276 L279 268 L272 360 L236 370 L229 320 Z",
                ],
            },
        },
        {
            "slug": "triceps",
            "path": {
                "left": [
                    "M502 290 L488 280 L497 360 L510 350 Z",
                ],
                "right": [
                    "M222 290 L236 280 L227 360 L214 350 Z",
                ],
            },
        },
        {
            "slug": "forearm",
            "path": {
                "left": [
                    "M499 376 L456 368 L472 480 L508 500 L520 450 Z",
                    "M520 452 L508 500 L522 520 L529 480 Z",
                ],
                "right": [
                    "M225 376 L268 368 L252 480 L216 500 L204 450 Z",
                    "M204 452 L216 500 L202 520 L195 480 Z",
                ],
            },
        },
        {
            "slug": "hands",
            "path": {
                "left": [
                    "M529 520 L504 506 L499 580 L526 600 L544 570 Z",
                ],
                "right": [
                    "M195 520 L220 506 L225 580 L198 600 L180 570 Z",
                ],
            },
        },
        {
            "slug": "abs",
            "path": {
                "left": [
                    "M391 300 L364 300 L364 360 L391 362 Z",
                    "M391 366 L364 364 L364 430 L389 432 Z",
                    "M389 436 L364 434 L364 500 L385 500 Z",
                ],
                "right": [
                    "M333 300 L360 300 L360 360 L333 362 Z",
                    "M333 366 L360 364 L360 430 L335 432 Z",
                    "M335 436 L360 434 L360 500 L339 500 Z",
                ],
            },
        },
        {
            "slug": "obliques",
            "path": {
                "left": [
                    "M425 304 L394 302 L393 470 L418 450 L430 380 Z",
                ],
                "right": [
                    "M299 304 L330 302 L331 470 L306 450 L294 380 Z",
                ],
            },
        },
        {
            "slug": "adductors",
            "path": {
                "left": [
                    "M400 540 L367 520 L373 640 L391 620 Z",
                ],
                "right": [
                    "M324 540 L357 520 L351 640 L333 620 Z",
                ],
            },
        },
        {
            "slug": "quadriceps",
            "path": {
                "left": [
                    "M438 520 L402 546 L394 640 L412 760 L443 740 L452 620 Z",
                    "M402 660 L378 650 L385 760 L407 770 Z",
                ],
                "right": [
                    "M286 520 L322 546 L330 640 L312 760 L281 740 L272 620 Z",
                    "M322 660 L346 650 L339 760 L317 770 Z",
                ],
            },
        },
        {
            "slug": "knees",
            "path": {
                "left": [
                    "M436 770 L391 772 L393 820 L432 820 Z",
                ],
                "right": [
                    "M288 770 L333 772 L331 820 L292 820 Z",
                ],
            },
        },
        {
            "slug": "tibialis",
            "path": {
                "left": [
                    "M418 830 L398 830 L403 990 L416 990 Z",
                ],
                "right": [
                    "M306 830 L326 830 L321 990 L308 990 Z",
                ],
            },
        },
        {
            "slug": "calves",
            "path": {
                "left": [
                    "M439 830 L420 834 L421 960 L443 930 L448 880 Z",
                ],
                "right": [
                    "M285 830 L304 834 L303 960 L281 930 L276 880 Z",
                ],
            },
        },
        {
            "slug": "ankles",
            "path": {
                "left": [
                    "M421 1000 L400 1000 L402 1030 L421 1030 Z",
                ],
                "right": [
                    "M303 1000 L324 1000 L322 1030 L303 1030 Z",
                ],
            },
        },
        {
            "slug": "feet",
            "path": {
                "left": [
                    "M427 1034 L398 1034 L394 1080 L445 1086 L443 1060 Z",
                ],
                "right": [
                    "M297 1034 L326 1034 L330 1080 L279 1086 L281 1060 Z",
                ],
            },
        },
    ]
)
